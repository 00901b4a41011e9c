"""
Scoreboard logic: match entity, store and errors
"""
