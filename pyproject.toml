[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cctag"
version = "0.1.0"
description = "Conic geometry, ellipse rasterisation and Canny edge detection for concentric circle tag detection"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ellipse", "conic", "geometry", "canny", "edge detection", "fiducial markers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cctag"]

[tool.pytest.ini_options]
addopts = "-ra"
