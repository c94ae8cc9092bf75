"""Configuration infrastructure - loading and detection."""

from .home import SwiftupHome
from .shell_detector import ShellDetector
from .yaml_loader import YAMLConfigLoader

__all__ = [
    "SwiftupHome",
    "YAMLConfigLoader",
    "ShellDetector",
]
