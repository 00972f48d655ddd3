"""Small pure helpers: bit reading, color parsing and logging setup."""
