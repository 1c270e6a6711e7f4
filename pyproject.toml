[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visionbasics"
version = "0.1.0"
description = "Plain NumPy implementations of basic image-processing operations: convolution, interpolation, colour conversion, morphology, pixel edits, masking, blob statistics and 8-bit BMP reading."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image processing",
    "computer vision",
    "convolution",
    "morphology",
    "interpolation",
    "masking",
    "bmp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visionbasics-bmp = "visionbasics.bmp:main"
visionbasics-morphology = "visionbasics.morphology:main"

[tool.hatch.build.targets.wheel]
packages = ["visionbasics"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
