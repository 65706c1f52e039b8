"""Platform adapters (logging) shared by dirsweep modules."""
