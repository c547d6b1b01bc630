# Import main lazily so that importing the engine does not pull in click
def __getattr__(name):
    if name == "main":
        from flowcast.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
