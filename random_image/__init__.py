from random_image.encoder import encode_png, to_image
from random_image.image_gen import generate_image, synthesize
from random_image.parser import parse_args
from random_image.simplex_noise_gen import NoiseField, Simplex
