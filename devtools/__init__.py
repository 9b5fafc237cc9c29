# -*- coding: utf-8 -*-
"""Developer build steps."""
