[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "officer-service"
version = "1.0.0"
description = "Small Flask API for listing and adding officers, with admin session login"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["flask", "api", "officers", "sessions", "wsgi", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
officer-service = "officer_service.app:main"

[tool.hatch.build.targets.wheel]
packages = ["officer_service"]

[tool.pytest.ini_options]
addopts = "-ra"
