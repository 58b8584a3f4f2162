"""Type definitions for stepwords."""

# Sorted-letter signature shared by all anagrams of a word ("cabals" -> "aabcls")
AnagramClass = str

# Ordered chain of distinct words, seed first, each one letter shorter than the last
CandidatePath = tuple[str, ...]
