"""
Arithmetic from plain English: "twenty one plus two times three" comes out as 27.
"""
