"""
Tags domain: labels shared across news items.
"""
