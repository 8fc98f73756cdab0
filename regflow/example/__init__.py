# -*- coding: utf-8 -*-
"""Runnable examples for regflow."""
