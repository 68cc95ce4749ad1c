"""Git operations used by the release checklist.

Usage:
    from shipit.git import Repository

    repo = Repository(runner)
    clean = repo.status_porcelain()
"""

from shipit.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
