import hashlib

import bcrypt
from django.conf import settings
from django.contrib.auth.hashers import BasePasswordHasher, mask_hash

class BCryptPepperHasher(BasePasswordHasher):
    """
    Salted bcrypt hashing of user passwords, mixed with the PEPPER setting.

    Stored form: "bcrypt_peppered$<bcrypt hash>". The bcrypt hash embeds
    its own salt and cost, checkpw compares in constant time.
    """
    algorithm = "bcrypt_peppered"

    def salt(self):
        # bcrypt salts are "$2b$<cost>$<22 chars>", kept as str for Django
        return bcrypt.gensalt().decode("ascii")

    def _pepper(self, password):
        # bcrypt rejects inputs over 72 bytes, so the peppered password is
        # reduced to a fixed-size hex digest first
        peppered = (password + settings.PEPPER).encode("utf-8")
        return hashlib.sha256(peppered).hexdigest().encode("ascii")

    def encode(self, password, salt):
        """
        Args:
            password (string): Raw password of the user.
            salt (string): A salt produced by `salt()`.

        Returns: "bcrypt_peppered$<bcrypt hash>"
        """
        digest = bcrypt.hashpw(self._pepper(password), salt.encode("ascii"))
        return f"{self.algorithm}${digest.decode('ascii')}"

    def decode(self, encoded):
        algorithm, digest = encoded.split("$", 1)
        return {"algorithm": algorithm, "hash": digest, "salt": digest[:29]}

    def verify(self, password, encoded):
        """
        Returns True when `password` matches `encoded`, False otherwise,
        including when `encoded` was produced by another algorithm.
        """
        algorithm, digest = encoded.split("$", 1)
        if algorithm != self.algorithm:
            return False

        return bcrypt.checkpw(self._pepper(password), digest.encode("ascii"))

    def safe_summary(self, encoded):
        decoded = self.decode(encoded)
        return {"algorithm": decoded["algorithm"], "hash": mask_hash(decoded["hash"], show=6)}

    def harden_runtime(self, password, encoded):
        # the cost factor lives inside the hash, nothing to pad
        pass
