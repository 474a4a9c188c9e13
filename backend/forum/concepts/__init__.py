"""
Concept instances.

The app is a composition of these concepts, synchronized together by the
route handlers in forum.api. No concept imports another.
"""
from forum.models.response import TargetKind

from .authenticating import AuthenticatingConcept
from .friending import FriendingConcept
from .labeling import LabelingConcept
from .responding import RespondingConcept, Target
from .sessioning import SessionDoc, SessioningConcept
from .sideing import SideingConcept
from .topicing import TopicingConcept
from .voting import VotingConcept

sessioning = SessioningConcept()
authing = AuthenticatingConcept()
topicing = TopicingConcept()
responding_to_topic = RespondingConcept(TargetKind.TOPIC)
responding_to_response = RespondingConcept(TargetKind.RESPONSE)
sideing = SideingConcept()
topic_labeling = LabelingConcept(TargetKind.TOPIC)
response_labeling = LabelingConcept(TargetKind.RESPONSE)
friending = FriendingConcept()
voting = VotingConcept()

__all__ = [
    "Target",
    "SessionDoc",
    "sessioning",
    "authing",
    "topicing",
    "responding_to_topic",
    "responding_to_response",
    "sideing",
    "topic_labeling",
    "response_labeling",
    "friending",
    "voting",
]
