"""
Generators — produce config snippets from typed form fields.

Each category module exposes one pure function per dialect that takes
the category's field record and returns the snippet text.
"""
