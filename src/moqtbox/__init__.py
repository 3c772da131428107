"""
moqtbox - Declarative development VMs for MoQT work.

Resolves shipped default settings overlaid with local overrides and declares
the "osx" and "linux" VM profiles for the VM runtime.
"""

__version__ = "0.1.0"
__author__ = "moqtbox Team"

from moqtbox.profiles import declare_profiles
from moqtbox.settings import MergedSettings, resolve

__all__ = ["MergedSettings", "declare_profiles", "resolve", "__version__"]
