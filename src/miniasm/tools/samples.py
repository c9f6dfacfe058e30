''' Bundled sample programs '''

from typing import Dict

HALF = '''
; My first program
mov  a, 5
inc  a
call function
msg  '(5+1)/2 = ', a    ; output message
end

function:
	div  a, 2
	ret
'''

POWER = '''
mov a, 2 ; value1
mov b, 10 ; value2
mov c, a ; temp1
mov d, b ; temp2
call proc_func
call print
end

proc_func:
cmp d, 1
je continue
mul c, a
dec d
call proc_func

continue:
ret

print:
msg a, '^', b, ' = ', c
ret
'''

SAMPLES: Dict[str, str] = {
    'half': HALF,
    'power': POWER,
}
