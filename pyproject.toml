[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvtools"
version = "0.1.0"
description = "User tools, a small allocator and Sv39 paging arithmetic of a RISC-V teaching operating system, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "risc-v",
    "sv39",
    "elf",
    "grep",
    "malloc",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvtools.grep:main"
xv-wc = "xvtools.textutils:wc_main"
xv-cat = "xvtools.textutils:cat_main"
xv-echo = "xvtools.textutils:echo_main"
xv-ls = "xvtools.fileutils:ls_main"
xv-find = "xvtools.fileutils:find_main"
xv-ln = "xvtools.fileutils:ln_main"
xv-mkdir = "xvtools.fileutils:mkdir_main"
xv-rm = "xvtools.fileutils:rm_main"

[tool.hatch.build.targets.wheel]
packages = ["xvtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
