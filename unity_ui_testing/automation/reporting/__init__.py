"""Allure-backed reporting for game UI tests."""

from .allure_helpers import attach_file, attach_image, content_type_for, record_step
from .reporter import Reporter
