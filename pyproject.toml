[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lwciphers"
version = "0.1.0"
description = "Pure-Python lightweight block ciphers: an Ascon-style sponge, SPECK-128/128, PRESENT-80 and AES-128"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "ascon", "speck", "present", "aes", "lightweight", "block cipher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lwciphers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
