"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Each model is the single collection owned by one concept. Models never hold
foreign keys to each other: a reference to another concept's entity is a bare
UUID column, so concepts stay independent and deleting a user does not cascade.

Models exported:
- User: Account credentials (Authenticating)
- Session: Server-side login session (Sessioning)
- Topic: Discussion topic (Topicing)
- Response: Reply to a topic or to another response (Responding)
- Side: A user's stance on a topic (Sideing)
- Label: Named tag over topics or responses (Labeling)
- FriendRequest, Friend: Friend relation (Friending)
- Vote: Up/down vote on a response (Voting)
"""
from .base import DocModel
from .user import User
from .session import Session
from .topic import Topic
from .response import Response, TargetKind
from .side import Side, Degree
from .label import Label
from .friend import FriendRequest, Friend, RequestStatus
from .vote import Vote
