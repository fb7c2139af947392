"""Descriptor loading exports."""

from .descriptor_models import FieldDescriptor, MessageDescriptor
from .descriptor_source import DescriptorDecodeError, load_message_descriptors

__all__ = [
    "FieldDescriptor",
    "MessageDescriptor",
    "DescriptorDecodeError",
    "load_message_descriptors",
]
