"""
Multi-line shell prompt with Azure & Git status

``status-ps1`` builds a command prompt that shows, above the usual path line:

- The current date & time
- The current user, tagged ``[ADMIN]`` when running with elevated privileges
- The active Azure CLI cloud & subscription (or that you are not logged in)
- The current Git branch, whether there are uncommitted changes, and the
  ``org/repo`` that the ``origin`` remote points to

Long paths are abbreviated to their first and last two components.  Missing
or slow ``az`` and ``git`` executables never break the prompt; the affected
segment is simply replaced or left out.

Bash setup (in ``~/.bashrc``)::

    PROMPT_COMMAND="$PROMPT_COMMAND"'; PS1="$(status-ps1 "${PS1_GIT:-}")"'

zsh setup (in ``~/.zshrc``)::

    precmd_status_ps1() { PS1="$(status-ps1 --zsh "${PS1_GIT:-}")" }
    precmd_functions+=( precmd_status_ps1 )

PowerShell setup (in ``$PROFILE``)::

    function prompt { (status-ps1 --plain) -join "`n" }

Setting ``PS1_GIT=off`` disables the Git integration for the current shell.
"""

__version__ = "0.1.0"
__license__ = "MIT"
