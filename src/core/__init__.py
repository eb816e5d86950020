"""Core domain package for feedsieve.

Core contains option lookup and the text, category and age rules without any
feed fetching, delivery or storage code, keeping the filtering logic portable.
"""
