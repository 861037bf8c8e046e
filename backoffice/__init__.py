"""
Backoffice API - usuarios, categorías y productos
"""
