[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baltas"
version = "0.1.0"
description = "Anticipation-based emotion system: value predictors, emotivectors, personalities and emotion selection for game agents."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "emotion",
    "affective computing",
    "emotivector",
    "anticipation",
    "prediction",
    "game ai",
    "agents",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baltas"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
