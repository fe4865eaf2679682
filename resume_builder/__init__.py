"""
Resume Builder - resume parsing and structuring backend.

Turns uploaded resumes (PDF, Word, plain text) into the structured resume
record used by the editor, the PDF renderer and the enhancement service.
"""

__app_name__ = "resume-builder"
__version__ = "0.1.0"
