[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgrka"
version = "0.1.0"
description = "Interactive toolkit for code-word XOR, Polybius square and toy RSA ciphers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "xor", "polybius", "rsa", "cryptography", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rgrka = "rgrka.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rgrka"]

[tool.pytest.ini_options]
addopts = "-ra"
