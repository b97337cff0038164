"""Core domain package for silencecrew.

Core contains crewmate classification, the suppression policy and the event
processor without any host-specific code, keeping the filtering logic portable.
"""
