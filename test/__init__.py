""" Test package for the signed grid containers. """
