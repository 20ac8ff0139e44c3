# -*- coding: utf-8 -*-
"""Bidou: meal and pain journal."""
