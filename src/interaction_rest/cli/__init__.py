"""`interactions` command line tool."""
