"""Application-level utilities (configuration, filesystem layout)."""

from .configuration import PlatformType, TestConfiguration, load_test_configuration
from .environment import Paths, build_default_paths
