"""Character, string, memory, linked-list, line-reading, output and printf helpers."""