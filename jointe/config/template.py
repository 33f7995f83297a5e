"""Default configuration template.

Written by `jointe config init` to ~/.config/jointe/config.toml, or to
the file named by JOINTE_CONFIG.
"""

CONFIG_TEMPLATE = """\
# Jointe Configuration

[defaults]
# MIME type used for file attachments when --mime is not given
mime = "application/octet-stream"

# Character set declared for HTML attachments
charset = "utf-8"

# Embed file and data attachments in the mail content
inline = false

# Treat HTML attachments as an alternative to the plain text body
alternative = true
"""
