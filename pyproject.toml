[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mqttkit"
version = "0.1.0"
description = "MQTT v5 client building blocks: packet models, message id allocation, acknowledgement ordering, topic routing and topic aliases"
requires-python = ">=3.10"
keywords = ["mqtt", "mqtt5", "iot", "messaging", "pubsub", "router"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mqttkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
