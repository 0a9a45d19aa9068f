"""
Command Line Interface for PyColorNoise

Command line utilities to generate noise textures and inspect their spectra
without writing Python scripts.

Available Commands:
- noise: Generate a noise texture and save it as PNG
- spectrum: Plot radially averaged spectra of generated noise colors

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise": (".noise_commands", "noise"),
    "spectrum": (".spectrum_commands", "spectrum"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
