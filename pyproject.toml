[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jiebaseg"
version = "0.1.0"
description = "Chinese word segmentation with dictionary, HMM and mixed segmenters, part-of-speech tagging and keyword extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["chinese", "segmentation", "tokenizer", "hmm", "tf-idf", "textrank", "nlp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jiebaseg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
