[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omniperspective"
version = "1.0.0"
description = "Generate perspective views from equirectangular and fisheye omnidirectional images"
requires-python = ">=3.10"
keywords = ["equirectangular", "fisheye", "panorama", "360", "perspective", "projection", "remap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[project.scripts]
360convert = "omniperspective.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["omniperspective"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
