[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelcast"
version = "0.1.0"
description = "A software voxel ray caster for VXL block maps with a pygame viewer"
requires-python = ">=3.10"
keywords = ["voxel", "raycasting", "vxl", "renderer", "blockworld"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelcast = "voxelcast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
