# This file makes the models directory a Python package
from .bible import Book, Verse
from .bookmark import Bookmark
from .chat_message import ChatMessage
from .setting import Setting

__all__ = [
    'Book',
    'Verse',
    'Bookmark',
    'ChatMessage',
    'Setting',
]
