"""
repositories/ - Data Access Layer
==================================
SQL for the `users` table: the parameterized insert, the select-all result
set and the mapping of raw rows onto `models.user.User`.
"""
