"""Host adapters that render the keyboard and feed it user input."""
