pytest_plugins = ["writebench._pytest_plugin"]
