"""Notes API: user account management for a note-taking application."""
