"""Conversation memory backends and wrappers."""