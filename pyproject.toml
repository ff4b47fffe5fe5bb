[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "operatorkit"
version = "0.1.0"
description = "Helpers for writing Kubernetes operators: labels, finalizers, CRD status, create-or-update, reconcile results, resource filtering and secrets."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "operator", "controller", "reconciler", "finalizer", "labels"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["operatorkit"]

[tool.pytest.ini_options]
addopts = "-ra"
