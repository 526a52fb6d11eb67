"""Hacker News client: scrape posts and comment threads, log in and vote."""

from .client import AuthenticatedSession, AuthMode, Client, authenticate
from .config import ClientConfig
from .exceptions import (
    AuthError,
    ExtractionError,
    HNClientError,
    MissingField,
    ParseFailure,
    StructuralInconsistency,
    TransportError,
)
from .models import Ack, Comment, Post, VoteAction, VoteDirection

__version__ = "0.1.0"

__all__ = [
    'Ack', 'AuthError', 'AuthMode', 'AuthenticatedSession', 'Client', 'ClientConfig',
    'Comment', 'ExtractionError', 'HNClientError', 'MissingField', 'ParseFailure',
    'Post', 'StructuralInconsistency', 'TransportError', 'VoteAction', 'VoteDirection',
    'authenticate',
]
