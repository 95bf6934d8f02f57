"""Sample dashboard used by the ``boxtui demo`` command."""

from __future__ import annotations

from boxtui.core.policy import SizePolicy
from boxtui.focus.chain import SimpleFocusChain
from boxtui.layout.box import Box, hbox, vbox
from boxtui.widgets.label import Label


def _panel(title: str, *lines: str, border: bool) -> tuple[Box, list[Label]]:
    labels = [Label(line) for line in lines]
    panel = vbox(*labels)
    panel.set_border(border)
    panel.set_title(title)
    return panel, labels


def build_dashboard(border: bool = True) -> tuple[Box, SimpleFocusChain]:
    """
    Build a three-panel dashboard with a header and status line.

    Returns the root box and a focus chain over the panel entries.
    """
    header = Label("boxtui dashboard", bold=True)
    header.set_size_policy(SizePolicy.EXPANDING, SizePolicy.MINIMUM)

    services, service_labels = _panel("Services", "api      up", "worker   up", "cron     idle", border=border)
    queues, queue_labels = _panel("Queues", "default  12", "mail      0", border=border)
    queues.set_size_policy(SizePolicy.MAXIMUM, SizePolicy.EXPANDING)
    log, log_labels = _panel("Log", "deploy finished", "cache warmed", border=border)
    log.set_size_policy(SizePolicy.EXPANDING, SizePolicy.EXPANDING)

    body = hbox(services, queues, log)
    body.set_size_policy(SizePolicy.EXPANDING, SizePolicy.EXPANDING)

    status = Label("Tab: next  Shift-Tab: previous")
    status.set_size_policy(SizePolicy.EXPANDING, SizePolicy.MINIMUM)

    root = vbox(header, body, status)
    chain = SimpleFocusChain(*service_labels, *queue_labels, *log_labels)
    return root, chain
