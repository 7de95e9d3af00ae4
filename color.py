'''
Library of miscellaneous functions related to color handling in console output.
'''

from colorist import Color, Effect, ColorHex
import os

def procHex(*args):
	'''
	Converts the given values (0-255) into a hex color code.
	'''
	return '#'+''.join([f'0{hex(s)[2:]}'[-2:] for s in args])

def str2Color(s: str):
	'''
	Converts the given string into an arbitrary (but consistent) color code.
	'''
	tot_num = 3*2551*sum([ord(c)**5 for c in s])
	R = int(tot_num%255)
	G = int((tot_num/1739)%255)
	B = int((tot_num*3717)%255)
	if R + G + B < 0.8*255: [R, G, B] = [min(255, 2*c + 64) for c in [R, G, B]] # too dark to read on a dark terminal
	return procHex(R, G, B)

def colorEnabled(use_color: bool=True) -> bool:
	'''
	Whether or not color codes should be written. Respects the `NO_COLOR` convention (https://no-color.org).
	'''
	return use_color and not os.environ.get('NO_COLOR')

def colored(text: str, color: Color=Color.DEFAULT, bold: bool=False, use_color: bool=True) -> str:
	'''
	Wraps the given text in the given color (and optionally bold), resetting afterwards. Returns the text unchanged if color is off.
	'''
	if not use_color: return text
	if bold: return f'{Effect.BOLD}{color}{text}{Color.OFF}{Effect.BOLD_OFF}'
	return f'{color}{text}{Color.OFF}'

def coloredHex(text: str, use_color: bool=True) -> str:
	'''
	Colors the given text with its own consistent color (see `str2Color`).
	'''
	if not use_color: return text
	hex_col = ColorHex(str2Color(text))
	return f'{hex_col}{text}{hex_col.OFF}'
