"""Confluence sub-package; it holds no modules."""