"""
Services for create-gaarf-wf.

- execution: running external commands (CommandRunner, scrollback helpers)
- macros: query-file macro discovery and resolution
- workflow: the provisioning wizard, generated scripts and saved answers
"""
