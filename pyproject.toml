[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burgerslab"
version = "0.1.0"
description = "Explicit finite-difference solver and interactive 3D surface viewer for u_t = nu*u_xx + u*u_x"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "matplotlib",
]
keywords = ["burgers equation", "finite differences", "pde", "visualization", "numerical methods"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
burgerslab = "burgerslab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["burgerslab"]

[tool.pytest.ini_options]
addopts = "-ra"
