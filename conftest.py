pytest_plugins = ["assertkit.pytest_plugin", "pytester"]
