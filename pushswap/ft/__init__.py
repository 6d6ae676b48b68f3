"""Small character, memory, string, output and linked-list helpers."""