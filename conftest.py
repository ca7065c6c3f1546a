pytest_plugins = ["samplekit.pytest_plugin"]
