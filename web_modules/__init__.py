"""
NiceGUI front-end for BoutiqueChat: storefront and admin panel.
"""
