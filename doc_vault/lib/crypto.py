"""Passphrase-based authenticated encryption for stored documents.

Blob layout (base64 of the concatenation):

	[16-byte salt][12-byte nonce][16-byte GCM tag][ciphertext]

The key is re-derived with PBKDF2-HMAC-SHA256 from the passphrase and the
embedded salt on every call; salt and nonce are fresh per blob.
"""
from __future__ import annotations
import base64, binascii, secrets
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from config.settings import (
	DEFAULT_ITERATIONS, SALT_LENGTH, KEY_LENGTH, IV_LENGTH, AUTH_TAG_LENGTH, MIN_BLOB_LENGTH
)
from .errors import EncryptionError

def _secure_zero(b: bytearray) -> None:
	for i in range(len(b)):
		b[i] = 0

class DocumentCipher:
	def __init__(self, iterations: int = DEFAULT_ITERATIONS):
		self.iterations = iterations

	def generate_salt(self) -> bytes:
		return secrets.token_bytes(SALT_LENGTH)

	def generate_nonce(self) -> bytes:
		return secrets.token_bytes(IV_LENGTH)

	def derive_key(self, passphrase: str, salt: bytes) -> bytearray:
		"""Stretch `passphrase` into a 32-byte AES key.

		Returned as a bytearray so callers can wipe it once the cipher is done.
		The immutable bytes that PBKDF2HMAC hands back cannot be wiped; that
		copy is dropped here and left to the garbage collector.
		"""
		kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=KEY_LENGTH, salt=salt, iterations=self.iterations)
		return bytearray(kdf.derive(passphrase.encode('utf-8')))

	def encrypt(self, plaintext: bytes, passphrase: str) -> str:
		salt = self.generate_salt()
		nonce = self.generate_nonce()
		key = self.derive_key(passphrase, salt)
		try:
			enc = Cipher(algorithms.AES(key), modes.GCM(nonce)).encryptor()
			ct = enc.update(plaintext) + enc.finalize()
			tag = enc.tag
		except (ValueError, TypeError) as e:
			raise EncryptionError("Encryption failed") from e
		finally:
			_secure_zero(key)
		return base64.b64encode(salt + nonce + tag + ct).decode('ascii')

	def decrypt(self, blob: str, passphrase: str) -> bytes:
		try:
			raw = base64.b64decode(blob, validate=True)
		except (binascii.Error, ValueError, TypeError) as e:
			raise EncryptionError("Decryption failed: malformed blob encoding") from e
		if len(raw) < MIN_BLOB_LENGTH:
			raise EncryptionError("Decryption failed: blob too short")
		salt = raw[:SALT_LENGTH]
		nonce = raw[SALT_LENGTH:SALT_LENGTH + IV_LENGTH]
		tag = raw[SALT_LENGTH + IV_LENGTH:MIN_BLOB_LENGTH]
		ct = raw[MIN_BLOB_LENGTH:]
		key = self.derive_key(passphrase, salt)
		try:
			dec = Cipher(algorithms.AES(key), modes.GCM(nonce, tag, min_tag_length=AUTH_TAG_LENGTH)).decryptor()
			return dec.update(ct) + dec.finalize()
		except InvalidTag as e:
			# wrong passphrase and tampered data must stay indistinguishable
			raise EncryptionError("Decryption failed") from e
		finally:
			_secure_zero(key)

_default_cipher = DocumentCipher()

def encrypt(plaintext: bytes, passphrase: str) -> str:
	return _default_cipher.encrypt(plaintext, passphrase)

def decrypt(blob: str, passphrase: str) -> bytes:
	return _default_cipher.decrypt(blob, passphrase)
