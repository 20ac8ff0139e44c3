# -*- coding: utf-8 -*-
"""Meals domain (history, meal being typed, ingredient keys)."""
