"""Random password and passphrase generator with entropy estimates."""

__version__ = '0.1.0'
