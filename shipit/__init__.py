"""shipit - checked package releases.

Runs a fixed checklist against the local repository before publishing a
package and tagging the release.
"""

__version__ = "0.1.0"
