"""
vigenere — Live Demo
====================
Run:  python examples/demo_vigenere.py

Encrypts and decrypts a message with the whole-string API, then shows
the stream transform with each case and non-letter policy.
"""

import sys, os, logging
from itertools import cycle, islice
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere import (
    VigenereCipher, encrypt_stream, decrypt_stream,
    ForceCase, NonLetterMode, InvalidKeyError,
)

LINE = "═" * 70
KEY  = "WHYRUST"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format=' %(name)s %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
header("Whole-string API")
cypher = VigenereCipher(KEY)
plain_text  = "TO EMPOWER EVERYONE"
cipher_text = cypher.encrypt(plain_text)
ok(f"Encrypting '{plain_text}' with key '{KEY}'", cipher_text)
ok(f"Decrypting '{cipher_text}' with key '{KEY}'", cypher.decrypt(cipher_text))

# ─────────────────────────────────────────────────────────────────────────────
header("Stream policies (key 'ABC', input 'H-i H+i')")
text = "H-i H+i"
ok("Keep case, keep non-letters", "".join(encrypt_stream(text, "ABC")))
ok("Force lower",  "".join(encrypt_stream(text, "ABC", force_case=ForceCase.TO_LOWER)))
ok("Force upper",  "".join(encrypt_stream(text, "ABC", force_case=ForceCase.TO_UPPER)))
ok("Skip non-letters",
   "".join(encrypt_stream(text, "ABC", non_letter_mode=NonLetterMode.SKIP)))

# ─────────────────────────────────────────────────────────────────────────────
header("Composition")
chained = decrypt_stream(encrypt_stream("Attack at dawn!", "LEMON"), "LEMON")
ok("decrypt(encrypt(...))", "".join(chained))
ok("First 12 of an infinite source",
   "".join(islice(encrypt_stream(cycle("ATTACK "), "LEMON"), 12)))

# ─────────────────────────────────────────────────────────────────────────────
header("Key validation")
try:
    VigenereCipher("")
except InvalidKeyError as e:
    ok("Empty key rejected", str(e))
