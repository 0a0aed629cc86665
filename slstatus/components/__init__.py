"""Status line components: each takes one string argument and returns text or None."""