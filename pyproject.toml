[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromafp"
version = "1.6.0"
description = "Audio fingerprinting building blocks: windowed FFT framing and compact fingerprint encoding"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "fingerprint", "fft", "spectrum", "compression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chromafp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
