"""Person record parsing.

The person layer converts a `"name,age"` string into a strict `Person` object, or rejects it with a
typed `ParsePersonError` instead of falling back to default values.
"""

