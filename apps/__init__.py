# -*- coding: utf-8 -*-
"""Command-line surfaces for the shuttle tools."""
