"""
Rubrics domain: the categories news items are filed under.
"""
