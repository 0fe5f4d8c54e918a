"""Lightweight block ciphers: an Ascon-style sponge, SPECK-128/128, PRESENT-80 and AES-128."""

__version__ = "0.1.0"