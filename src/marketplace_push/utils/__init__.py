# -*- coding: utf-8 -*-
"""Utility modules."""

from marketplace_push.utils.boundary import best_effort, failure_boundary
from marketplace_push.utils.validation import is_valid_token, mask_token, optional_str

__all__ = ["best_effort", "failure_boundary", "is_valid_token", "mask_token", "optional_str"]
