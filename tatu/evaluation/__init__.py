"""Special-form evaluation, function application and the tail-call trampoline."""
