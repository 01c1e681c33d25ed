"""
Default directory tree that every new session starts with.

Author: YSNRFD
Version: 1.0.0
"""

from .node import FileNode


WELCOME_TEXT = "Welcome to Hyper Terminal!\nThis is a simulated file system."

BASHRC = """# ~/.bashrc - Bash configuration file

# Aliases
alias ll='ls -la'
alias la='ls -A'
alias l='ls -CF'
alias grep='grep --color=auto'
alias ..='cd ..'
alias ...='cd ../..'

# Environment variables
export PATH="/usr/local/bin:/usr/bin:/bin"
export EDITOR="nano"
export HISTSIZE=1000
export HISTFILESIZE=2000

# Custom prompt
export PS1='\\[\\033[01;32m\\]\\u@\\h\\[\\033[00m\\]:\\[\\033[01;34m\\]\\w\\[\\033[00m\\]\\$ '

# Functions
function mkcd() {
    mkdir -p "$1" && cd "$1"
}

echo "Bash configuration loaded\""""

ZSHRC = """# ~/.zshrc - Zsh configuration file

# Aliases
alias ll='ls -la'
alias la='ls -A'
alias l='ls -CF'
alias grep='grep --color=auto'
alias ..='cd ..'
alias ...='cd ../..'

# Environment variables
export PATH="/usr/local/bin:/usr/bin:/bin"
export EDITOR="nano"
export HISTSIZE=1000
export SAVEHIST=1000
export HISTFILE=~/.zsh_history

# Zsh options
setopt AUTO_CD
setopt HIST_VERIFY
setopt SHARE_HISTORY

# Custom prompt
export PS1='%F{green}%n@%m%f:%F{blue}%~%f%# '

# Functions
function mkcd() {
    mkdir -p "$1" && cd "$1"
}

echo "Zsh configuration loaded\""""

FISH_CONFIG = """# ~/.config/fish/config.fish - Fish configuration file

# Aliases
alias ll 'ls -la'
alias la 'ls -A'
alias l 'ls -CF'
alias grep 'grep --color=auto'
alias .. 'cd ..'
alias ... 'cd ../..'

# Environment variables
set -gx PATH /usr/local/bin /usr/bin /bin
set -gx EDITOR nano

# Functions
function mkcd
    mkdir -p $argv[1]; and cd $argv[1]
end

# Fish greeting
function fish_greeting
    echo "Fish shell configuration loaded"
end"""

POWERSHELL_PROFILE = """# Microsoft.PowerShell_profile.ps1 - PowerShell configuration file

# Aliases
Set-Alias ll Get-ChildItem
Set-Alias la Get-ChildItem
Set-Alias grep Select-String

# Environment variables
$env:EDITOR = "notepad"

# Functions
function mkcd($path) {
    New-Item -ItemType Directory -Path $path -Force | Out-Null
    Set-Location $path
}

function .. { Set-Location .. }
function ... { Set-Location ../.. }

# Custom prompt
function prompt {
    "PS " + (Get-Location) + "> "
}

Write-Host "PowerShell configuration loaded" -ForegroundColor Green"""

# Persona name -> (path of its rc file, default body)
DEFAULT_RC_FILES = {
    'bash': ('/home/user/.bashrc', BASHRC),
    'zsh': ('/home/user/.zshrc', ZSHRC),
    'fish': ('/home/user/.config/fish/config.fish', FISH_CONFIG),
    'powershell': ('/home/user/Microsoft.PowerShell_profile.ps1', POWERSHELL_PROFILE),
}


def build_default_tree(
    directory_size: int = 4096,
    directory_permissions: str = "drwxr-xr-x",
    file_permissions: str = "-rw-r--r--"
) -> FileNode:
    """Build a fresh root directory populated with the standard layout."""

    def d(name, *children):
        return FileNode.directory(
            name,
            children={c.name: c for c in children},
            permissions=directory_permissions,
            size=directory_size,
        )

    def f(name, content):
        return FileNode.file(name, content, permissions=file_permissions)

    return d(
        '/',
        d(
            'home',
            d(
                'user',
                f('welcome.txt', WELCOME_TEXT),
                f('.bashrc', BASHRC),
                f('.zshrc', ZSHRC),
                d('.config', d('fish', f('config.fish', FISH_CONFIG))),
                f('Microsoft.PowerShell_profile.ps1', POWERSHELL_PROFILE),
                d('documents'),
            ),
        ),
        d('usr', d('bin')),
    )
