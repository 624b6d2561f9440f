# hoyalist/middleware/__init__.py
