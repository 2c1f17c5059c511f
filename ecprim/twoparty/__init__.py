"""Two-party protocols: coin tossing and Diffie-Hellman key exchange."""