[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshcraft"
version = "0.1.0"
description = "Polygon clipping against rectangles and tessellation of basic 3D shapes into triangle meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "clipping", "tessellation", "mesh", "polygon", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshcraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
