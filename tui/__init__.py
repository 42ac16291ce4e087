"""Terminal front end for GAzie.

The modules are split so everything except `tui.terminal` can be imported
and exercised without a real terminal: `tui.state` holds the snapshot and
its transition function, `tui.views` turns a snapshot into text blocks.
"""
