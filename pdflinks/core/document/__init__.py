"""
PDF objects, link annotation building and writing.
"""
