SEPARATOR_LINE_LENGTH = 60
