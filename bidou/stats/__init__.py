# -*- coding: utf-8 -*-
"""Stats domain (food families and average pain).

Everything here is computed from the meal history on each request; nothing is stored.
"""
