"""
Checkers package for accessibility issues.
"""

from .image_checker import ImageChecker
from .heading_checker import HeadingChecker
from .form_checker import FormLabelChecker
from .contrast_checker import ContrastChecker
from .page_checker import LangChecker, TitleChecker
from .link_checker import EmptyLinkChecker, SkipLinkChecker

__all__ = [
    'ImageChecker',
    'HeadingChecker',
    'FormLabelChecker',
    'ContrastChecker',
    'TitleChecker',
    'LangChecker',
    'EmptyLinkChecker',
    'SkipLinkChecker',
]
