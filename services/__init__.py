# -*- coding: utf-8 -*-
"""
Profile Wizard Service Layer
"""
