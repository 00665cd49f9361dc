"""Hosts that drive an editor session: the raw terminal and Textual."""
