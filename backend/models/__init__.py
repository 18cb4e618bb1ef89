from models.login import LoginSubmission

__all__ = ["LoginSubmission"]
