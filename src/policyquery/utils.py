"""Utility functions for the policy/quote query tool."""

import sys
import uuid

import boto3

from .errors import InvalidArgumentError


class DebugContext:
    """Context manager for debug output"""

    def __init__(self, enabled=False):
        """Initialize debug context with optional enabled state."""
        self.enabled = enabled

    def print(self, *args, **kwargs):
        """Print debug messages with [DEBUG] prefix and timestamp when enabled"""
        if self.enabled:
            import datetime

            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            debug_prefix = f"[DEBUG] {timestamp}"

            if args:
                first_arg = f"{debug_prefix} {args[0]}"
                remaining_args = args[1:]
                print(first_arg, *remaining_args, file=sys.stderr, **kwargs)
            else:
                print(debug_prefix, file=sys.stderr, **kwargs)

    def enable(self):
        """Enable debug output"""
        self.enabled = True

    def disable(self):
        """Disable debug output"""
        self.enabled = False


# Global debug context
_debug_context = DebugContext()


def debug_print(*args, **kwargs):
    """Print debug messages with [DEBUG] prefix and timestamp when debug mode is enabled"""
    _debug_context.print(*args, **kwargs)


def set_debug_enabled(value):
    """Set debug mode on or off"""
    if value:
        _debug_context.enable()
    else:
        _debug_context.disable()


def validate_uuid(value):
    """Return value unchanged if it is a syntactically valid UUID.

    Accepts the forms Python's uuid module parses: hyphenated, bare hex,
    braced and urn:uuid: prefixed. The original string is returned so that
    partition keys are built from exactly what the operator typed.
    """
    if not value:
        raise InvalidArgumentError(
            "The final argument must be an ID (either quote or policy) which we are supposed to get"
        )
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidArgumentError(f"The final argument must be a valid UUID: {value!r} ({e})")
    return value


def create_session(region=None, profile=None):
    """Create boto3 session with optional region/profile"""
    debug_print(f"create_session called with region={repr(region)}, profile={repr(profile)}")
    session_kwargs = {}
    if region and region.strip():
        session_kwargs["region_name"] = region
        debug_print(f"Added region_name={region} to session")
    if profile and profile.strip():
        session_kwargs["profile_name"] = profile
        debug_print(f"Added profile_name={profile} to session")
    debug_print(f"Creating session with kwargs: {session_kwargs}")
    return boto3.Session(**session_kwargs)


def get_client(service, session=None):
    """Get boto3 client from session or create default"""
    if session:
        return session.client(service)
    return boto3.client(service)
