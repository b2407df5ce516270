# -*- coding: utf-8 -*-
"""Profile wizard step services."""
