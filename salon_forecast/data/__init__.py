"""
Reading record tables and writing forecast reports.
"""
