"""Editor integration for minirb."""
