[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vwo_fme"
version = "1.3.0"
description = "Data models, settings validation, flag results and event payloads for feature-management and experimentation clients"
requires-python = ">=3.11"
dependencies = []
keywords = ["feature-flags", "experimentation", "rollout", "a/b testing", "settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vwo_fme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
