"""Static file server for end-to-end test front-end resources."""
